from cvstudio.extensions import db


class Skill(db.Model):
    __tablename__ = "skills"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    cv_id = db.Column(db.Integer, db.ForeignKey("cvs.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    level = db.Column(db.String(50), nullable=False, default="Intermediate")  # Beginner .. Expert
    category = db.Column(db.String(100), nullable=False, default="Technical")
    years_of_experience = db.Column(db.Integer)
    display_order = db.Column(db.Integer, nullable=False, default=0)

    cv = db.relationship("CV", back_populates="skills")
