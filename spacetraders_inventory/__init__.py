from .__version__ import VERSION
from .client_api import WebProxy
from .client_interface import InventoryProxy
from .collector import InventoryCollector
from .errors import DecodeError, InventoryError, ServerError, TransportError
from .metrics import MetricsSink, PrometheusMetricsSink
from .user import User
