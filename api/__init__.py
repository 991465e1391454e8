"""HTTP layer: request models and routers."""
