"""Record sources: readers that supply sale and order events.

- **RestSalesReader / RestOrdersReader**: read from the shop data service
- **CsvSalesReader / CsvOrdersReader**: read from exported CSV tables
- **parse_sale_records / parse_order_records**: raw rows to events

Example:
    >>> from shop_core.config import ShopConfig
    >>> from shop_core.sources import RestClient, RestSalesReader
    >>>
    >>> client = RestClient(ShopConfig.from_env())
    >>> sales = RestSalesReader(client).fetch()
"""

from shop_core.sources.base import OrdersReader, SalesReader
from shop_core.sources.files import CsvOrdersReader, CsvSalesReader
from shop_core.sources.records import parse_order_records, parse_sale_records
from shop_core.sources.rest import RestClient, RestOrdersReader, RestSalesReader

__all__ = [
    "CsvOrdersReader",
    "CsvSalesReader",
    "OrdersReader",
    "RestClient",
    "RestOrdersReader",
    "RestSalesReader",
    "SalesReader",
    "parse_order_records",
    "parse_sale_records",
]
