# Route modules for the demo backend, one per API namespace.
# `app.py` mounts health routes at the root and the rest under the versioned path.
