from cvstudio.extensions import db
from datetime import datetime


class CV(db.Model):
    __tablename__ = "cvs"
    __table_args__ = (
        # one primary CV per owner; MySQL has no partial indexes, so scan-and-clear
        # in PrimaryInvariantManager is the only guard there
        db.Index(
            "uq_cvs_user_primary",
            "user_id",
            unique=True,
            postgresql_where=db.text("is_primary"),
            sqlite_where=db.text("is_primary"),
        ).ddl_if(dialect=("postgresql", "sqlite")),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False, default="")
    summary = db.Column(db.Text, nullable=False, default="")
    template = db.Column(db.String(50), nullable=False, default="Modern")
    is_primary = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)  # set by the store on content changes

    personal_info = db.relationship(
        "PersonalInfo", back_populates="cv", uselist=False, cascade="all, delete-orphan"
    )
    experiences = db.relationship(
        "Experience",
        back_populates="cv",
        cascade="all, delete-orphan",
        order_by="[Experience.display_order, Experience.id]",
    )
    educations = db.relationship(
        "Education",
        back_populates="cv",
        cascade="all, delete-orphan",
        order_by="[Education.display_order, Education.id]",
    )
    skills = db.relationship(
        "Skill",
        back_populates="cv",
        cascade="all, delete-orphan",
        order_by="[Skill.display_order, Skill.id]",
    )
    projects = db.relationship(
        "Project",
        back_populates="cv",
        cascade="all, delete-orphan",
        order_by="[Project.display_order, Project.id]",
    )
    certifications = db.relationship(
        "Certification",
        back_populates="cv",
        cascade="all, delete-orphan",
        order_by="[Certification.display_order, Certification.id]",
    )

    def __repr__(self):
        return f"<CV {self.id} user={self.user_id} primary={self.is_primary}>"
