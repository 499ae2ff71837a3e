from payments_api.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all
from payments_api.app.models.payment import Payment  # noqa: F401
