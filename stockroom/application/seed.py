"""
Sample catalogue seeding.

Creates a starter set of categories and products through the service
façade. Entries that already exist are skipped, so seeding can run on
every startup.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from stockroom.config import get_logger
from stockroom.core.entities.product import ProductInput
from stockroom.core.exceptions import AlreadyExistsError, StockroomError
from stockroom.core.services import CategoryService, ProductService

logger = get_logger(__name__)

SEED_CATEGORIES: tuple[str, ...] = (
    "Electronics",
    "Food",
    "Books",
    "Clothing",
    "Home & Kitchen",
    "Sports",
    "Beauty",
    "Toys",
)

# (name, category, unit price, stock, days until expiry or None)
SEED_PRODUCTS: tuple[tuple[str, str, str, int, int | None], ...] = (
    ("Laptop Pro", "Electronics", "1500.00", 10, None),
    ("Smartphone X", "Electronics", "800.00", 25, None),
    ("Wireless Headphones", "Electronics", "150.00", 40, None),
    ("Smartwatch 5", "Electronics", "300.00", 15, None),
    ("Gaming Mouse", "Electronics", "75.00", 30, None),
    ("Organic Apples", "Food", "2.50", 100, 7),
    ("Whole Wheat Bread", "Food", "3.20", 50, 3),
    ("Milk Carton", "Food", "1.80", 60, 10),
    ("Cereal Box", "Food", "4.50", 80, 182),
    ("Coffee Beans", "Food", "12.00", 35, None),
    ("The Great Novel", "Books", "25.00", 30, None),
    ("Science Textbook", "Books", "70.00", 8, None),
    ("Fantasy Series Vol. 1", "Books", "18.00", 20, None),
    ("Summer T-Shirt", "Clothing", "15.99", 20, None),
    ("Jeans Slim Fit", "Clothing", "45.00", 18, None),
    ("Winter Jacket", "Clothing", "89.99", 5, None),
    ("Blender Pro", "Home & Kitchen", "99.99", 12, None),
    ("Coffee Maker", "Home & Kitchen", "70.00", 8, None),
    ("Yoga Mat", "Sports", "29.99", 25, None),
    ("Dumbbell Set", "Sports", "55.00", 10, None),
    ("Face Moisturizer", "Beauty", "22.50", 30, None),
    ("Shampoo Large", "Beauty", "10.00", 50, None),
    ("Building Blocks Set", "Toys", "35.00", 40, None),
    ("Remote Control Car", "Toys", "60.00", 15, None),
    # Out of stock and already expired
    ("Expired Milk", "Food", "1.00", 0, -1),
)


@dataclass
class SeedResult:
    """Counts of what a seeding run did."""

    categories_created: int = 0
    products_created: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)


async def seed_inventory(
    category_service: CategoryService,
    product_service: ProductService,
    today: date | None = None,
) -> SeedResult:
    """Create the sample catalogue, ignoring entries that already exist."""
    today = today or date.today()
    result = SeedResult()

    logger.info("seed_started")

    for name in SEED_CATEGORIES:
        try:
            await category_service.create_category(name)
            result.categories_created += 1
        except AlreadyExistsError:
            logger.warning("seed_category_exists", category_name=name)
            result.skipped += 1
        except StockroomError as e:
            logger.error("seed_category_failed", category_name=name, error=e.message)
            result.errors.append(f"{name}: {e.message}")

    for name, category_name, price, stock, expires_in in SEED_PRODUCTS:
        info = ProductInput(
            name=name,
            category_name=category_name,
            unit_price=Decimal(price),
            stock_quantity=stock,
            expiration_date=today + timedelta(days=expires_in) if expires_in is not None else None,
        )
        try:
            await product_service.create_product(info)
            result.products_created += 1
        except AlreadyExistsError:
            logger.warning("seed_product_exists", name=name)
            result.skipped += 1
        except StockroomError as e:
            logger.error("seed_product_failed", name=name, error=e.message)
            result.errors.append(f"{name}: {e.message}")

    logger.info(
        "seed_complete",
        categories_created=result.categories_created,
        products_created=result.products_created,
        skipped=result.skipped,
        errors=len(result.errors),
    )
    return result
