from kmdb.models import db, movie_actor

class Actor(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    birth_date = db.Column(db.String(10), nullable=False)  # ISO 8601, yyyy-MM-dd

    movies = db.relationship("Movie", secondary=movie_actor, back_populates="actors")

    def __repr__(self):
        return f"<Actor {self.id}:{self.name}>"
