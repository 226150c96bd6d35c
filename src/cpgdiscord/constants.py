"""Unified constants for CpGDiscord.

Window geometry and the per-position bit codes are shared by the encoder
and the discordance engine; the defaults are shared by the config layer
and the CLI.
"""

# ================== Window Geometry ==================
# Maximum supported distance (bp) between an anchor CpG and any base of a
# read encoded against it.
MAX_READ_HALF_LENGTH: int = 51

# Number of positions in an encoded window; index MAX_READ_HALF_LENGTH is the anchor
WINDOW_SIZE: int = 2 * MAX_READ_HALF_LENGTH + 1


# ================== Window Bit Codes ==================
# 0b000 not covered, 0b001 covered, 0b011 covered CpG (unmethylated),
# 0b111 covered CpG (methylated)
COVERED: int = 0b001
CPG: int = 0b010
METHYLATED: int = 0b100


# ================== Bismark Tags ==================
METHYLATION_TAG: str = "XM"
GENOME_CONVERSION_TAG: str = "XG"
METHYLATED_CPG_CALL: str = "Z"
UNMETHYLATED_CPG_CALL: str = "z"
BOTTOM_STRAND_CONVERSION: str = "GA"


# ================== Defaults ==================
DEFAULT_MIN_QUAL: int = 10
DEFAULT_MAX_DEPTH: int = 40
DEFAULT_MIN_OVERLAP: int = 35

# Reads between two progress reports
PROGRESS_INTERVAL: int = 10000

# Highest mapping quality representable in a BAM record
MAX_MAPQ: int = 255
