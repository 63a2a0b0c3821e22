from cvstudio.extensions import db


class Project(db.Model):
    __tablename__ = "projects"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    cv_id = db.Column(db.Integer, db.ForeignKey("cvs.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default="")
    technologies = db.Column(db.String(255))
    project_link = db.Column(db.String(255))
    github_link = db.Column(db.String(255))
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    display_order = db.Column(db.Integer, nullable=False, default=0)

    cv = db.relationship("CV", back_populates="projects")
