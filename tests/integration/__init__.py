"""Integration tests for CpGDiscord.

These run the full CLI on small BAM files generated with pysam.

Run with: pytest tests/integration/ -v
"""
