"""Resource files and configuration templates."""


def get_default_config() -> str:
    """Return default configuration YAML content."""
    return """# tickbar Configuration File

# Progress line settings
progress:
  # Text printed before the percentage
  prefix: ""
  # Number of cells in the [####    ] bar
  bar_size: 30
  # Minimum seconds between two redraws of the line
  min_update_time: 0.15
  # Where the line is drawn: stderr | stdout
  stream: "stderr"

# Runtime settings
runtime:
  log_level: "WARNING"
  log_file: ~
"""
