from cvstudio.extensions import db


class Education(db.Model):
    __tablename__ = "educations"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    cv_id = db.Column(db.Integer, db.ForeignKey("cvs.id", ondelete="CASCADE"), nullable=False, index=True)
    degree = db.Column(db.String(255), nullable=False)
    institution = db.Column(db.String(255), default="")
    location = db.Column(db.String(255), default="")
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    currently_studying = db.Column(db.Boolean, nullable=False, default=False)
    grade = db.Column(db.String(50))
    description = db.Column(db.Text, default="")
    display_order = db.Column(db.Integer, nullable=False, default=0)

    cv = db.relationship("CV", back_populates="educations")
