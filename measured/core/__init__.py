"""
Shared configuration, logging, errors and the public decorators.
"""
