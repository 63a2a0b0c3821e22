from cvstudio.extensions import db


class Experience(db.Model):
    __tablename__ = "experiences"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    cv_id = db.Column(db.Integer, db.ForeignKey("cvs.id", ondelete="CASCADE"), nullable=False, index=True)
    job_title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), default="")
    location = db.Column(db.String(255), default="")
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    currently_working = db.Column(db.Boolean, nullable=False, default=False)
    description = db.Column(db.Text, default="")
    display_order = db.Column(db.Integer, nullable=False, default=0)

    cv = db.relationship("CV", back_populates="experiences")
