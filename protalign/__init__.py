"""Local pairwise alignment of protein sequences."""
