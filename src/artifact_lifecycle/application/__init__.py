"""
Application Layer

Services implementing artifact lifecycle use cases.
"""
