from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS

cors = CORS()

db = SQLAlchemy()
migrate = Migrate()

# owner identity comes from the JWT subject
jwt = JWTManager()
