import logging

from flask import Blueprint, abort, jsonify, request

from content import (
    FAQ,
    JOB_CATEGORIES,
    SITE_ROUTES,
    TESTIMONIALS,
    TRUSTED_COMPANIES,
    all_tags,
    filter_posts,
    format_post_date,
    list_jobs,
    post_metadata,
    reading_time,
    related_posts,
)
from exceptions import DuplicateRecordError, StorageError
from responses import error_response, success_response
from store import get_store
from validation import is_blank, is_valid_email

logger = logging.getLogger(__name__)

bp = Blueprint("api", __name__, url_prefix="/api")


def published_posts():
    return get_store().query(
        "blog_posts", filters={"published": True}, order_by="published_at", descending=True
    )


def with_reading_details(post):
    post = dict(post)
    post["readingTime"] = reading_time(post["content"])
    post["publishedOn"] = format_post_date(post["published_at"])
    return post


# Route table of the single-page app
@bp.route("/routes", methods=["GET"])
def get_routes():
    return jsonify({"routes": SITE_ROUTES})


@bp.route("/jobs", methods=["GET"])
def get_jobs():
    category = request.args.get("category", "all")
    jobs = list_jobs(category)
    return jsonify({
        "jobs": jobs,
        "count": len(jobs),
        "categories": JOB_CATEGORIES,
    })


@bp.route("/faq", methods=["GET"])
def get_faq():
    return jsonify({"faq": list(FAQ)})


@bp.route("/testimonials", methods=["GET"])
def get_testimonials():
    return jsonify({"testimonials": list(TESTIMONIALS)})


@bp.route("/trusted-companies", methods=["GET"])
def get_trusted_companies():
    return jsonify({"companies": list(TRUSTED_COMPANIES)})


@bp.route("/blog", methods=["GET"])
def get_blog_posts():
    try:
        posts = published_posts()
    except StorageError as e:
        logger.error("Error fetching blog posts: %s", e)
        abort(500, description="Failed to retrieve blog posts")

    filtered = filter_posts(
        posts, search=request.args.get("search", ""), tag=request.args.get("tag", "")
    )
    return jsonify({
        "posts": [with_reading_details(post) for post in filtered],
        "tags": all_tags(posts),
    })


@bp.route("/blog/<slug>", methods=["GET"])
def get_blog_post(slug):
    try:
        matches = get_store().query(
            "blog_posts", filters={"slug": slug, "published": True}, limit=1
        )
        if not matches:
            abort(404, description="Blog post not found")
        post = matches[0]
        related = related_posts(post, published_posts()) if post["tags"] else []
    except StorageError as e:
        logger.error("Error fetching blog post %s: %s", slug, e)
        abort(500, description="Failed to retrieve blog post")

    body = with_reading_details(post)
    body.update(post_metadata(post))
    body["related"] = [with_reading_details(other) for other in related]
    return jsonify(body)


# Route to submit a newsletter subscription
@bp.route("/subscriptions", methods=["POST"])
def create_subscription():
    data = request.get_json(silent=True)
    email = data.get("email") if isinstance(data, dict) else None

    if is_blank(email):
        abort(400, description="Email is required")
    if not is_valid_email(email):
        abort(400, description="Please enter a valid email address")

    try:
        get_store().insert("email_subscriptions", {"email": email.strip()})
    except DuplicateRecordError:
        return success_response("You are already subscribed!", alreadySubscribed=True)
    except StorageError as e:
        logger.error("Subscription insert failed: %s", e)
        return error_response(500, "Something went wrong. Please try again.")

    return success_response("Thank you for subscribing!", status_code=201)
