from mangum import Mangum
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eligibility.api import create_app
from eligibility.config import configure_logging, get_settings

configure_logging(get_settings())

app = create_app(root_path="/api")

handler = Mangum(app, lifespan="off")
