"""
User interfaces for discrete_bayes
"""
