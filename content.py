"""Read-only site content and the helpers the content API uses."""

import math
from datetime import datetime, timezone

SECONDS_PER_DAY = 24 * 60 * 60

SITE_ROUTES = [
    {"path": "/", "page": "home"},
    {"path": "/apply", "page": "apply"},
    {"path": "/hire", "page": "hire"},
    {"path": "/jobs", "page": "jobs"},
    {"path": "/terms", "page": "terms"},
    {"path": "/privacy", "page": "privacy"},
    {"path": "/contact", "page": "contact"},
    {"path": "/blog", "page": "blog"},
    {"path": "/blog/:slug", "page": "blog-post"},
]

JOB_CATEGORIES = ["Technical Roles", "Medical Roles", "Marketing Roles", "Finance Roles"]

# Refreshed by hand every few weeks
JOB_LISTINGS = (
    {
        "id": "1",
        "title": "Senior Full Stack Developer",
        "company": "",
        "location": "Orlando, FL",
        "type": "Full-time",
        "salary": "$95,000 - $130,000",
        "description": "Senior Full Stack Developer position requiring expertise in React, Node.js, and cloud technologies. Remote work options available.",
        "postedDate": "2025-09-28",
        "source": "Technical Roles",
    },
    {
        "id": "2",
        "title": "Digital Marketing Specialist",
        "company": "",
        "location": "Winter Park, FL",
        "type": "Full-time",
        "salary": "$75,000 - $90,000",
        "description": "Digital marketing specialist role focusing on SEO, PPC, and social media campaigns. Analytics experience preferred.",
        "postedDate": "2025-09-29",
        "source": "Marketing Roles",
    },
    {
        "id": "3",
        "title": "Registered Nurse - Emergency Department",
        "company": "",
        "location": "Orlando, FL",
        "type": "Full-time",
        "salary": "$80,000 - $100,000",
        "description": "Emergency Department RN position. BSN required, ED experience preferred. Comprehensive benefits package included.",
        "postedDate": "2025-09-30",
        "source": "Medical Roles",
    },
    {
        "id": "4",
        "title": "Senior Financial Analyst",
        "company": "",
        "location": "Lakeland, FL",
        "type": "Full-time",
        "salary": "$70,000 - $85,000",
        "description": "Senior Financial Analyst role involving financial modeling and investment analysis. CFA or MBA preferred.",
        "postedDate": "2025-10-01",
        "source": "Finance Roles",
    },
    {
        "id": "5",
        "title": "Cloud DevOps Engineer",
        "company": "",
        "location": "San Juan, PR",
        "type": "Full-time",
        "salary": "$100,000 - $125,000",
        "description": "Cloud DevOps Engineer specializing in AWS, Docker, and Kubernetes. CI/CD pipeline experience essential.",
        "postedDate": "2025-10-02",
        "source": "Technical Roles",
    },
    {
        "id": "6",
        "title": "Content Marketing Manager",
        "company": "",
        "location": "Remote",
        "type": "Full-time",
        "salary": "$85,000 - $105,000",
        "description": "Content Marketing Manager role focusing on brand storytelling and content strategy. Remote position available.",
        "postedDate": "2025-10-03",
        "source": "Marketing Roles",
    },
    {
        "id": "7",
        "title": "Nurse Practitioner - Family Medicine",
        "company": "",
        "location": "Winter Garden, FL",
        "type": "Full-time",
        "salary": "$110,000 - $130,000",
        "description": "Family Medicine Nurse Practitioner position. MSN and certification required. Excellent work-life balance.",
        "postedDate": "2025-10-04",
        "source": "Medical Roles",
    },
    {
        "id": "8",
        "title": "Investment Advisor",
        "company": "",
        "location": "Aguadilla, PR",
        "type": "Full-time",
        "salary": "$90,000 - $140,000",
        "description": "Investment Advisor role serving high-net-worth clients. Series 7 and 66 licenses required.",
        "postedDate": "2025-10-05",
        "source": "Finance Roles",
    },
)

FAQ = (
    {
        "question": "What areas do you serve?",
        "answer": "We serve Central Florida (with a focus on the Orlando region), Puerto Rico, and remote opportunities across the United States. Our expertise lies in connecting talent within these markets to exceptional career opportunities.",
    },
    {
        "question": "What types of positions do you focus on?",
        "answer": "We specialize in high-paying positions ($60,000+ starting salary) in four key sectors: Technology, Healthcare, Finance, and Marketing. All our placements are based on skills and talent, not biases.",
    },
    {
        "question": "How does your placement process work?",
        "answer": "We match candidates based on a comprehensive questionnaire and interview process to ensure the right fit for both our community and our clients. This approach ensures we understand your skills, expertise, and career goals to find the perfect match.",
    },
    {
        "question": "What is your placement guarantee?",
        "answer": "We offer a 15-day placement guarantee with a free one-time replacement if any discrepancies occur between either party. This guarantee applies within a 45-day window from the request date, ensuring peace of mind for both candidates and clients.",
    },
    {
        "question": "How much do your services cost?",
        "answer": "For candidates, our services are completely free. For employers, we work on a commission basis of 20% split into two payments: half after the candidate is handed over, and the remaining half after successful placement.",
    },
    {
        "question": "How quickly can I expect a response to my inquiry?",
        "answer": "We respond to all inquiries within 3 business days, excluding U.S. holidays. Our office hours are Monday through Thursday, 9am to 3pm EST. For urgent matters, please call us at 407-949-0718.",
    },
    {
        "question": "Do you help with resume writing and interview preparation?",
        "answer": "Yes! As part of our candidate support services, we provide guidance on resume optimization and interview preparation to help you present your best self to potential employers.",
    },
    {
        "question": "What makes ShiftORL different from other recruiting agencies?",
        "answer": "We focus on skills, not biases. Our approach is rooted in Orlando and driven by talent, with deep community connections in Central Florida and Puerto Rico. We take the time to understand both our candidates and clients to create lasting, successful placements.",
    },
    {
        "question": "How often are new job listings updated?",
        "answer": "Our job listings are refreshed every 3 weeks to ensure you have access to the latest high-paying opportunities in your field. Subscribe to our email updates to be notified when new positions become available.",
    },
    {
        "question": "Can I apply for multiple positions?",
        "answer": "Absolutely! We encourage you to apply for any positions that match your skills and career goals. Our team will work with you to identify the best opportunities based on your qualifications and preferences.",
    },
)

TESTIMONIALS = (
    {
        "company": "Mariner Finance",
        "initials": "MF",
        "quote": "ShiftORL helped us find exceptional finance professionals who understood both our business needs and the local market. Their commitment to matching skills with opportunities is unmatched.",
        "subtitle": "Financial Services Leader",
        "location": "Central Florida",
    },
    {
        "company": "Andor Health",
        "initials": "AH",
        "quote": "The healthcare talent ShiftORL provided exceeded our expectations. They truly understand the unique requirements of medical staffing and deliver candidates who are both qualified and culturally aligned.",
        "subtitle": "Healthcare Technology",
        "location": "Orlando, FL",
    },
    {
        "company": "Career Source",
        "initials": "CS",
        "quote": "As a workforce development organization, we appreciate ShiftORL's dedication to skills-first hiring. They share our values and consistently connect talented individuals with meaningful opportunities.",
        "subtitle": "Workforce Development Partner",
        "location": "Florida Statewide",
    },
    {
        "company": "Lemonade Inc",
        "initials": "LI",
        "quote": "ShiftORL understands the fast-paced startup environment. They helped us build our marketing team with creative, driven professionals who hit the ground running.",
        "subtitle": "Marketing & Creative Agency",
        "location": "Winter Park, FL",
    },
    {
        "company": "Happy Co",
        "initials": "HC",
        "quote": "Finding tech talent in Puerto Rico was challenging until we partnered with ShiftORL. Their regional expertise and commitment to quality placements made all the difference.",
        "subtitle": "Technology Startup",
        "location": "San Juan, PR",
    },
    {
        "company": "PH3",
        "initials": "PH",
        "quote": "ShiftORL helped us scale from 3 to 15 talented professionals in just 12 weeks. Their understanding of startups and ability to find culture-fit candidates has been exceptional.",
        "subtitle": "Marketing Growth Partner",
        "location": "Orlando, FL",
    },
)

TRUSTED_COMPANIES = (
    "PH3",
    "Happy Co",
    "Lemonade Inc",
    "Mariner Finance",
    "Andor Health",
    "Career Source",
    "Local Startups",
    "Tech Companies",
)


def posted_ago(posted_date, now=None):
    """Human-friendly age of a listing, e.g. ``3 days ago``.

    Listing dates are midnight UTC; partial days count as a whole day.
    """
    now = now or datetime.now(timezone.utc)
    posted = datetime.fromisoformat(posted_date).replace(tzinfo=timezone.utc)
    diff_days = math.ceil(abs((now - posted).total_seconds()) / SECONDS_PER_DAY)

    if diff_days == 1:
        return "1 day ago"
    if diff_days < 7:
        return f"{diff_days} days ago"
    if diff_days < 30:
        return f"{diff_days // 7} weeks ago"
    return f"{diff_days // 30} months ago"


def list_jobs(category=None, now=None):
    jobs = [dict(job) for job in JOB_LISTINGS]
    if category and category != "all":
        jobs = [job for job in jobs if job["source"] == category]
    for job in jobs:
        job["postedAgo"] = posted_ago(job["postedDate"], now)
    return jobs


def reading_time(content, words_per_minute=200):
    word_count = len((content or "").split(" "))
    return math.ceil(word_count / words_per_minute)


def filter_posts(posts, search="", tag=""):
    search = (search or "").lower()
    matches = []
    for post in posts:
        matches_search = search in post["title"].lower() or search in (post["excerpt"] or "").lower()
        matches_tag = not tag or tag in post["tags"]
        if matches_search and matches_tag:
            matches.append(post)
    return matches


def all_tags(posts):
    seen = []
    for post in posts:
        for tag in post["tags"]:
            if tag not in seen:
                seen.append(tag)
    return seen


def related_posts(post, candidates, limit=3):
    """Other posts sharing at least one tag with ``post``."""
    tags = set(post["tags"])
    if not tags:
        return []
    related = [
        other for other in candidates
        if other["id"] != post["id"] and tags.intersection(other["tags"])
    ]
    return related[:limit]


def post_metadata(post):
    return {
        "metaTitle": post.get("meta_title") or f"{post['title']} | ShiftORL Thrive",
        "metaDescription": post.get("meta_description") or post["excerpt"],
    }


def format_post_date(value):
    if not value:
        return None
    return datetime.fromisoformat(value).strftime("%B %d, %Y").replace(" 0", " ")
