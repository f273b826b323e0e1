import pytest

from application.session import TaxonomySession
from domain.taxonomy import parse_taxonomy_text

SAMPLE_CATALOG = """\
# Google_Product_Taxonomy_Version: 2021-09-21
Apparel & Accessories
Apparel & Accessories > Clothing
Apparel & Accessories > Clothing > Shirts
Apparel & Accessories > Shoes
Apparel & Accessories > Shoes > Athletic Shoes
Apparel & Accessories > Shoes > Athletic Shoes > Sneakers
Apparel & Accessories > Shoes > Athletic Shoes > Running Shoes
Electronics
Electronics > Phones
Electronics > Phones > Mobile Phones
Electronics > Phones > Mobile Phones > Smartphones
Toys
"""


@pytest.fixture
def catalog_text() -> str:
    return SAMPLE_CATALOG


@pytest.fixture
def session() -> TaxonomySession:
    return TaxonomySession.from_parsed(parse_taxonomy_text(SAMPLE_CATALOG))
