import click
from campus_finder import db
from campus_finder.lost_and_found.models import Category

# Campus categories and their descriptions
CATEGORIES = [
    {"name": "Electronics", "description": "Devices such as phones, laptops, and accessories."},
    {"name": "Clothing", "description": "Apparel including shirts, pants, jackets, and more."},
    {"name": "Books", "description": "Textbooks, novels, and other reading material."},
    {"name": "Bags & Backpacks", "description": "Backpacks, handbags, and other types of bags."},
    {"name": "Stationery", "description": "Pens, notebooks, and other writing supplies."},
    {"name": "Keys", "description": "Lost keys including car and house keys."},
    {"name": "Jewelry", "description": "Items such as rings, necklaces, and bracelets."},
    {"name": "Sporting Goods", "description": "Equipment and accessories for sports activities."},
    {"name": "Wallets", "description": "Wallets or purses with personal items."},
    {"name": "ID Cards", "description": "Student cards, ID cards, and badges."},
    {"name": "Others", "description": "Items that do not fit into the other categories."}
]


def register_commands(app):
    @app.cli.command('drop-db')
    def drop_db():
        """Drops all tables in the database."""
        db.drop_all()
        click.echo("Dropped all tables.")

    @app.cli.command('create-db')
    def create_db():
        """Creates all tables in the database."""
        db.create_all()
        click.echo("Created all tables.")

    @app.cli.command('reinitialize-db')
    def reinitialize_db():
        """Drops and recreates all tables in the database."""
        db.drop_all()
        click.echo("Dropped all tables.")
        db.create_all()
        click.echo("Created all tables.")

    @app.cli.command('seed-categories')
    def seed_categories():
        """Adds the campus categories that are not in the database yet."""
        existing = {name for (name,) in db.session.query(Category.name).all()}
        added = 0
        for category_data in CATEGORIES:
            if category_data["name"] in existing:
                continue
            db.session.add(Category(name=category_data["name"], description=category_data["description"]))
            added += 1
        db.session.commit()
        click.echo(f"Added {added} categories.")
