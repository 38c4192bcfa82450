"""Engine subpackage - tool catalog, charge calendar and checkout pricing."""
from .pricing_engine import PricingEngine
from .catalog import ToolCatalog, load_catalog
from .models import Tool, RentalRequest, RentalAgreement, TraceStep

__all__ = [
    'PricingEngine', 'ToolCatalog', 'load_catalog',
    'Tool', 'RentalRequest', 'RentalAgreement', 'TraceStep',
]
