from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def init_db(app):
    # app.config["SQLALCHEMY_DATABASE_URI"] must already be set
    db.init_app(app)
