"""Sample data for a fresh database.

Rows are created through the services, so seeded data passes the same
uniqueness and default-address checks as API traffic.
"""

from decimal import Decimal

from loguru import logger
from sqlmodel import Session

from src.storefront.core.services import build_services
from src.storefront.entities.address import AddressCreate
from src.storefront.entities.product import ProductRequest
from src.storefront.entities.user import UserCreate, UserRole

SAMPLE_USERS = [
    UserCreate(name="Admin User", email="admin@example.com", phone="1234567890", role=UserRole.ADMIN),
    UserCreate(name="John Doe", email="john.doe@example.com", phone="9876543210", role=UserRole.CUSTOMER),
    UserCreate(name="Jane Smith", email="jane.smith@example.com", phone="5551234567", role=UserRole.CUSTOMER),
]

# (owner email, address fields)
SAMPLE_ADDRESSES = [
    ("admin@example.com", dict(street="100 Admin Plaza", city="New York", state="NY",
                               zip_code="10001", country="USA", address_type="WORK", is_default=True)),
    ("john.doe@example.com", dict(street="123 Main Street", city="Los Angeles", state="CA",
                                  zip_code="90001", country="USA", address_type="HOME", is_default=True)),
    ("john.doe@example.com", dict(street="456 Business Blvd", city="Los Angeles", state="CA",
                                  zip_code="90002", country="USA", address_type="WORK", is_default=False)),
    ("jane.smith@example.com", dict(street="789 Oak Avenue", city="Chicago", state="IL",
                                    zip_code="60601", country="USA", address_type="HOME", is_default=True)),
]

SAMPLE_PRODUCTS = [
    ProductRequest(name="Wireless Mouse", description="Ergonomic 2.4 GHz mouse",
                   price=Decimal("24.99"), quantity=150, category="Electronics", sku="ELEC-MOUSE-01"),
    ProductRequest(name="Mechanical Keyboard", description="Tenkeyless, brown switches",
                   price=Decimal("89.50"), quantity=40, category="Electronics", sku="ELEC-KBD-02"),
    ProductRequest(name="Standing Desk", description="Height adjustable desk",
                   price=Decimal("349.00"), quantity=0, category="Furniture", sku="FURN-DESK-01"),
]


def seed_sample_data(session: Session) -> bool:
    """Load the sample rows unless users already exist. Returns whether anything was loaded."""
    services = build_services(session)

    if services.users.count_users().unwrap() > 0:
        logger.info("Database already contains data. Skipping initialization.")
        return False

    logger.info("Initializing database with sample data...")
    user_ids = {}
    for request in SAMPLE_USERS:
        user = services.users.create_user(request).unwrap()
        user_ids[user.email] = user.id

    for owner_email, fields in SAMPLE_ADDRESSES:
        services.addresses.create_address(AddressCreate(user_id=user_ids[owner_email], **fields)).unwrap()

    for request in SAMPLE_PRODUCTS:
        services.products.create_product(request).unwrap()

    logger.info(
        "Sample data initialized: {} users, {} addresses, {} products",
        services.users.count_users().unwrap(),
        services.addresses.count_addresses().unwrap(),
        services.products.count_products().unwrap(),
    )
    return True
