"""
Thin pygame adapters around the gameplay core.
"""
