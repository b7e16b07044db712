"""
Infrastructure Layer

Record store backends, the SQLAlchemy database, logging, notification
channels, constants and the exception taxonomy.
"""
