"""Pure engines: policy validators, composite validation, scoring, strategy intake, briefs and prompts."""
