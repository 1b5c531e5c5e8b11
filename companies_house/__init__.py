"""
Companies House registry proxy: response models and API client.
"""
__version__ = "0.1.0"
