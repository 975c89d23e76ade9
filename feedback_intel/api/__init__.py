"""HTTP routers, dependencies and response models."""
