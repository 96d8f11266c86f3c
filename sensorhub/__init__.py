"""SensorHub: IoT distance monitoring and device control API with role-based access."""
