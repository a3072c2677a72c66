"""Load a handful of sample template kits into the catalog."""

from __future__ import annotations

import argparse
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.template_kits import create_template_kit
from app.domain.errors import ValidationFailed
from app.infrastructure.database import SessionLocal, initialize_database

SAMPLE_TEMPLATE_KITS: list[dict] = [
    {
        "name": "Modern Business Template",
        "description": "A comprehensive business template with landing pages, contact forms, and portfolio sections.",
        "category": "Business",
        "author": "DesignPro",
        "version": "1.0.0",
        "thumbnail": "https://example.com/thumbnails/modern-business.jpg",
        "tags": ["business", "modern", "corporate", "professional"],
        "industries": ["Consulting", "Finance"],
        "files": ["index.html", "about.html", "contact.html", "styles.css", "script.js"],
        "price": Decimal("29.99"),
        "is_active": True,
    },
    {
        "name": "E-commerce Store Kit",
        "description": "Complete e-commerce template with product listings, shopping cart, and checkout pages.",
        "category": "E-commerce",
        "author": "ShopMaster",
        "version": "2.1.0",
        "thumbnail": "https://example.com/thumbnails/ecommerce-store.jpg",
        "tags": ["ecommerce", "shop", "store", "products"],
        "industries": ["Retail", "Fashion"],
        "files": ["shop.html", "product.html", "cart.html", "checkout.html"],
        "price": Decimal("49.99"),
        "is_active": True,
    },
    {
        "name": "Creative Portfolio",
        "description": "Showcase your work with this elegant portfolio template featuring galleries and project pages.",
        "category": "Portfolio",
        "author": "CreativeStudio",
        "version": "1.5.0",
        "thumbnail": "https://example.com/thumbnails/creative-portfolio.jpg",
        "tags": ["portfolio", "creative", "gallery", "projects"],
        "industries": ["Photography", "Design"],
        "files": ["portfolio.html", "gallery.html", "project-detail.html"],
        "price": Decimal("19.99"),
        "is_active": True,
    },
    {
        "name": "Restaurant & Cafe",
        "description": "Delicious template for restaurants, cafes, and food businesses with menu and reservation features.",
        "category": "Food & Beverage",
        "author": "FoodieDesigns",
        "version": "1.2.0",
        "thumbnail": "https://example.com/thumbnails/restaurant-cafe.jpg",
        "tags": ["restaurant", "food", "menu", "cafe"],
        "industries": ["Hospitality"],
        "files": ["home.html", "menu.html", "reservations.html", "contact.html"],
        "price": Decimal("24.99"),
        "is_active": True,
    },
    {
        "name": "Tech Startup Landing",
        "description": "Modern landing page for tech startups and SaaS products with feature showcase.",
        "category": "Landing Page",
        "author": "TechLaunch",
        "version": "1.0.0",
        "thumbnail": "https://example.com/thumbnails/tech-startup.jpg",
        "tags": ["startup", "tech", "saas", "landing"],
        "industries": ["Technology", "Software"],
        "files": ["landing.html", "features.html", "pricing.html"],
        "price": Decimal("34.99"),
        "is_active": True,
    },
    {
        "name": "Blog & Magazine",
        "description": "Content-rich blog and magazine template with article layouts and category pages.",
        "category": "Blog",
        "author": "ContentCraft",
        "version": "2.0.0",
        "thumbnail": "https://example.com/thumbnails/blog-magazine.jpg",
        "tags": ["blog", "magazine", "articles", "news"],
        "industries": ["Media", "Publishing"],
        "files": ["blog-home.html", "article.html", "category.html", "author.html"],
        "price": Decimal("15.99"),
        "is_active": False,
    },
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the catalog with sample template kits.")
    parser.add_argument(
        "--times",
        type=int,
        default=1,
        help="How many copies of the sample set to insert (default: 1)",
    )
    return parser.parse_args()


def main() -> None:
    """Insert the sample kits ``--times`` times."""

    args = parse_args()
    if args.times < 1:
        raise SystemExit("--times must be at least 1")

    initialize_database()

    session = SessionLocal()
    created = 0
    try:
        for _ in range(args.times):
            for kit in SAMPLE_TEMPLATE_KITS:
                create_template_kit(session, **kit)
                created += 1
    except (ValidationFailed, SQLAlchemyError) as exc:
        session.rollback()
        raise SystemExit(f"Seeding stopped after {created} kits: {exc}") from exc
    finally:
        session.close()

    print(f"Seeded {created} template kits.")


if __name__ == "__main__":
    main()
