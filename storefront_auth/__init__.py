"""storefront-auth - account signup, registration and login for the storefront backend."""

__version__ = "0.1.0"
