"""Domain services: credential store, authentication, RBAC gate, telemetry and control."""
