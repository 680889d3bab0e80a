"""
Snake & Ladder.

Board rules engine with Supabase-backed game records.
"""

__version__ = "0.1.0"
