"""
One row per logical store key (users, patients, appointments, loggedInUser).
The value column holds the JSON document for the whole collection.
"""
from hospital_dashboard.extensions import db
from datetime import datetime


class StoreEntry(db.Model):
    __tablename__ = 'store_entries'

    key = db.Column(db.String(64), primary_key=True)
    value = db.Column(db.Text, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<StoreEntry {self.key}>"
