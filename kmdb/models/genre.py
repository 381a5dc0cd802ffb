from kmdb.models import db, movie_genre

class Genre(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    movies = db.relationship("Movie", secondary=movie_genre, back_populates="genres")

    def __repr__(self):
        return f"<Genre {self.id}:{self.name}>"
