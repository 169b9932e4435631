"""CodePipeline Lambda hooks."""
