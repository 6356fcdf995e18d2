"""
API package containing versioned routes.

Each version subpackage exposes a top‑level ``router`` which includes
all of its endpoints.  ``main.create_app`` mounts it under the version
prefix.
"""
