"""
Channel List Pipeline
"""
