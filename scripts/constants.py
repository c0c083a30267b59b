"""Constants for the project."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Data directories
# ============================================================================
DATA_FOLDER = PROJECT_ROOT / "data"
FASTA_FOLDER = DATA_FOLDER / "fasta"
QUERY_FASTA = FASTA_FOLDER / "query.fa"
CANDIDATES_FASTA = FASTA_FOLDER / "candidates.fa"

# Bundled BLOSUM62; any BLOSUM text or YAML table can be passed instead
DEFAULT_PENALTY_TABLE = PROJECT_ROOT / "protalign" / "data" / "blosum62.txt"

# ============================================================================
# Results directories
# ============================================================================
RESULTS_FOLDER = PROJECT_ROOT / "results"

# Per-candidate scores from best_match.py
BEST_MATCH_CSV = RESULTS_FOLDER / "best_match.csv"

# Score matrix heatmaps (from plot_score_matrix.py)
SCORE_MATRIX_FIGURES_FOLDER = RESULTS_FOLDER / "figures"

# ============================================================================
# Algorithm parameters
# ============================================================================
DEFAULT_WORKERS = 1
FORMAT_WIDTH = 60

# ============================================================================
# Demo sequences
# ============================================================================
DEMO_X = "HEAGAWGHEE"
DEMO_Y = "PAWHEAE"

# ============================================================================
# Plot styling
# ============================================================================
PATH_COLOR = "#A23B72"
HEATMAP_CMAP = "viridis"
PLOT_DPI = 300
PLOT_XLABEL_FONTSIZE = 12
PLOT_YLABEL_FONTSIZE = 12
PLOT_TITLE_FONTSIZE = 14
