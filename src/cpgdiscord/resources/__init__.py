"""Resource files and configuration templates."""


def get_default_config() -> str:
    """Return default configuration YAML content."""
    return """# CpGDiscord Configuration File

# Input/output files (can be overridden by CLI arguments)
input_file: ~
output_file: ~
# Optional tab-separated target CpG list (chrom, position); ~ scores all CpGs
cpg_set: ~

# FDRP parameters
fdrp:
  min_qual: 10
  max_depth: 40
  min_overlap: 35
  seed: ~

# Runtime settings
runtime:
  log_level: "WARNING"
  log_file: ~
  enable_progress: true
  progress_interval: 10000
"""
