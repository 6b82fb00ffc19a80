"""HealthFinder: healthcare facility search API and client."""
