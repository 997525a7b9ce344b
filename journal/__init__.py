"""Personal journaling service: owner-scoped entries behind federated sign-in."""

__version__ = "1.0.0"
