"""
Collapse duplicate FASTA/FASTQ records and report which headers were merged
"""

__version__ = '0.1.0'
