from pathlib import Path

from demokit_inference.parser.detect import detect_format, load_schema
from demokit_inference.parser.postman import parse_postman

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectPostman:
    def test_detect_postman_format(self):
        assert detect_format(FIXTURES / "store.postman.json") == "postman"


class TestPostmanParser:
    def test_parse_endpoints_count(self):
        schema = parse_postman(FIXTURES / "store.postman.json")
        assert len(schema.endpoints) == 3
        assert schema.info.title == "Store"

    def test_parse_folder_requests(self):
        schema = parse_postman(FIXTURES / "store.postman.json")
        list_products, get_product = schema.endpoints[:2]
        assert list_products.path == "/api/products"
        assert [p.name for p in list_products.query_params] == ["page"]
        assert get_product.path == "/api/products/:productId"
        assert [p.name for p in get_product.path_params] == ["productId"]
        assert get_product.path_params[0].description == "Product id"

    def test_parse_raw_url_and_body(self):
        schema = parse_postman(FIXTURES / "store.postman.json")
        create_order = schema.endpoints[2]
        assert create_order.method == "POST"
        assert create_order.path == "/api/orders"
        assert create_order.request_body == {"productId": "p1"}

    def test_load_schema_auto(self):
        schema = load_schema(FIXTURES / "store.postman.json")
        assert len(schema.endpoints) == 3
