from .extensions import db

NAME_MAX_LENGTH = 64


class Participant(db.Model):
    __tablename__ = "participants"

    id = db.Column(db.Integer, primary_key=True)
    # Names are display labels only; two people may share one.
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<Participant {self.id} {self.name!r}>"
