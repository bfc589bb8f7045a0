# Pydantic request and response models for the demo API, grouped by namespace.
