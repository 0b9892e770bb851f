from flask_sqlalchemy import SQLAlchemy

# Shared database instance backing the local key/value store
db = SQLAlchemy()
