"""Seed listings shown before any real data is fetched."""

from __future__ import annotations

from typing import Any

from ..schemas import Listing

SAMPLE_LISTINGS: list[dict[str, Any]] = [
    {
        "id": "1",
        "title": "Professional Plumber Needed",
        "name": "John Smith",
        "company": "HomeServices Co.",
        "location": "Brooklyn, NY",
        "salary_range": "$45-60/hr",
        "type": "Contract",
        "posted_time": "2h ago",
        "image": "https://images.unsplash.com/photo-1621905251189-08b45d6a269e?w=200&h=200&fit=crop",
        "category": "Plumbing",
        "status": "available",
        "rating": 4.8,
        "reviews": 32,
        "verification": "premium",
        "description": (
            "Professional plumber with over 10 years of experience in residential and commercial "
            "plumbing. Specialized in pipe installation, repair, and maintenance."
        ),
    },
    {
        "id": "2",
        "title": "House Cleaning Professional",
        "name": "Maria Garcia",
        "company": "CleanPro Inc.",
        "location": "Manhattan, NY",
        "salary_range": "$30-40/hr",
        "type": "Part-time",
        "posted_time": "5h ago",
        "image": "https://images.unsplash.com/photo-1581578731548-c64695cc6952?w=200&h=200&fit=crop",
        "category": "Cleaning",
        "status": "busy",
        "rating": 4.6,
        "reviews": 48,
        "verification": "verified",
        "description": (
            "Experienced house cleaner with attention to detail. Provides thorough cleaning services "
            "for apartments, houses, and offices. Uses eco-friendly cleaning products."
        ),
    },
    {
        "id": "3",
        "title": "Experienced Hair Stylist",
        "name": "Amy Chen",
        "company": "Style Studio",
        "location": "Queens, NY",
        "salary_range": "$50-70/hr",
        "type": "Full-time",
        "posted_time": "1d ago",
        "image": "https://images.unsplash.com/photo-1560066984-138dadb4c035?w=200&h=200&fit=crop",
        "category": "Hair Styling",
        "status": "offline",
        "rating": 4.9,
        "reviews": 76,
        "description": (
            "Creative hair stylist with 8+ years of experience. Specializing in modern cuts, coloring, "
            "and styling."
        ),
    },
    {
        "id": "4",
        "title": "Babysitter for Weekends",
        "name": "Emily Johnson",
        "company": "Family Care",
        "location": "Bronx, NY",
        "salary_range": "$25-35/hr",
        "type": "Part-time",
        "posted_time": "6h ago",
        "image": "https://images.unsplash.com/photo-1516627145497-ae6968895b40?w=200&h=200&fit=crop",
        "category": "Baby Sitting",
        "status": "available",
        "rating": 4.7,
        "reviews": 24,
        "description": (
            "Loving and responsible babysitter with experience working with children of all ages. "
            "Certified in CPR and first aid."
        ),
    },
    {
        "id": "5",
        "title": "Handyman for Home Repairs",
        "name": "David Martinez",
        "company": "Urban Fixers",
        "location": "Jersey City, NJ",
        "salary_range": "$40-55/hr",
        "type": "Contract",
        "posted_time": "12h ago",
        "image": "https://images.unsplash.com/photo-1588964895597-cfccd63bc041?w=200&h=200&fit=crop",
        "category": "Handy Work",
        "status": "busy",
        "rating": 4.5,
        "reviews": 52,
        "description": (
            "Skilled handyman offering a wide range of home repair services, including carpentry, "
            "painting, minor electrical and plumbing work."
        ),
    },
]


def sample_listings() -> list[Listing]:
    return [Listing.model_validate(item) for item in SAMPLE_LISTINGS]
