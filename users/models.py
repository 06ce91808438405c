from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from app.extensions import db

class User(db.Model):
    """User record owning an ordered list of health logs.

    The log list is a weak reference: logs keep a nullable ``user_id`` and are
    never deleted along with a user.
    """
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    firstname = db.Column(db.String(80), nullable=True)
    lastname = db.Column(db.String(80), nullable=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(120), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    health_logs = db.relationship(
        'HealthLog',
        backref='user',
        lazy=True,
        order_by='HealthLog.id',
        cascade='save-update, merge'
    )

    def __init__(self, **kwargs):
        password = kwargs.pop('password', None)
        super(User, self).__init__(**kwargs)
        if password is not None:
            self.set_password(password)

    def set_password(self, password):
        """Create hashed password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check hashed password."""
        if self.password_hash is None:
            return False
        return check_password_hash(self.password_hash, password)

    def to_dict(self, populate=False):
        """Return user data as dictionary.

        With ``populate`` the health log references are resolved into
        embedded documents, otherwise only their ids are listed.
        """
        if populate:
            health_log = [log.to_dict() for log in self.health_logs]
        else:
            health_log = [log.id for log in self.health_logs]
        return {
            '_id': self.id,
            'firstname': self.firstname,
            'lastname': self.lastname,
            'username': self.username,
            'email': self.email,
            'healthLog': health_log,
            'created_at': self.created_at.isoformat() if self.created_at else None
        }

    def __repr__(self):
        return f'<User {self.username}>'
