from datetime import datetime, timezone

from db import db


def utcnow():
    return datetime.now(timezone.utc)


def isoformat(value):
    return value.isoformat() if value else None


# Contact form submissions
class ClientInquiry(db.Model):
    __tablename__ = 'client_inquiries'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(320), nullable=False)
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "created_at": isoformat(self.created_at),
        }


# Footer newsletter sign-ups
class EmailSubscription(db.Model):
    __tablename__ = 'email_subscriptions'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(320), nullable=False, unique=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "created_at": isoformat(self.created_at),
        }


# Blog posts are written out-of-band; the site only reads them
class BlogPost(db.Model):
    __tablename__ = 'blog_posts'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False, unique=True, index=True)
    content = db.Column(db.Text, nullable=False, default="")
    excerpt = db.Column(db.Text, nullable=False, default="")
    author = db.Column(db.String(100), nullable=False, default="ShiftORL Team")
    featured_image = db.Column(db.String(500))
    tags = db.Column(db.JSON, nullable=False, default=list)
    meta_title = db.Column(db.String(255))
    meta_description = db.Column(db.String(320))
    published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    published_at = db.Column(db.DateTime(timezone=True))
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "content": self.content,
            "excerpt": self.excerpt,
            "author": self.author,
            "featured_image": self.featured_image,
            "tags": list(self.tags or []),
            "meta_title": self.meta_title,
            "meta_description": self.meta_description,
            "published": self.published,
            "published_at": isoformat(self.published_at),
            "created_at": isoformat(self.created_at),
        }
