"""
Core processing for fancywalks.
"""
