from cvstudio.extensions import db


class PersonalInfo(db.Model):
    __tablename__ = "personal_infos"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    cv_id = db.Column(db.Integer, db.ForeignKey("cvs.id", ondelete="CASCADE"), nullable=False, unique=True)
    full_name = db.Column(db.String(255), nullable=False)
    job_title = db.Column(db.String(255), default="")
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(50), default="")
    location = db.Column(db.String(255), default="")
    linkedin = db.Column(db.String(255))
    github = db.Column(db.String(255))
    website = db.Column(db.String(255))

    cv = db.relationship("CV", back_populates="personal_info")
