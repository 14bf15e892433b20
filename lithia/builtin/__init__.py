"""Default builtin environments: std (env_builtin), maths and sys."""
