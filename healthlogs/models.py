from datetime import datetime
from app.extensions import db

# Wire name -> column name
FIELD_MAP = {
    'prescriptionName': 'prescription_name',
    'doctorprescribed': 'doctor_prescribed',
    'dateprescribed': 'date_prescribed',
    'amount': 'amount',
    'generalinstructions': 'general_instructions',
}

class HealthLog(db.Model):
    """A single prescription entry."""
    __tablename__ = 'health_logs'

    id = db.Column(db.Integer, primary_key=True)
    prescription_name = db.Column(db.Text, nullable=True)
    doctor_prescribed = db.Column(db.Text, nullable=True)
    date_prescribed = db.Column(db.String(40), nullable=True)
    amount = db.Column(db.String(40), nullable=True)
    general_instructions = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)

    @classmethod
    def from_dict(cls, data):
        """Build a log from wire fields, ignoring keys outside the schema."""
        kwargs = {}
        for key, column in FIELD_MAP.items():
            if key in data and data[key] is not None:
                kwargs[column] = str(data[key])
        return cls(**kwargs)

    def to_dict(self):
        """Return health log data as dictionary."""
        return {
            '_id': self.id,
            'prescriptionName': self.prescription_name,
            'doctorprescribed': self.doctor_prescribed,
            'dateprescribed': self.date_prescribed,
            'amount': self.amount,
            'generalinstructions': self.general_instructions,
            'user_id': self.user_id,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<HealthLog {self.prescription_name}>'
