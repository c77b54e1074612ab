"""Tests for the key generator and the CSV importer."""

from unittest.mock import MagicMock

import pytest
from dotenv import dotenv_values

from auth.generate_key import add_key_to_env, generate_api_key
from import_from_csv import insert_direct, parse_row, post_to_api, read_products
from repository.product_repository import SqliteProductRepository

CSV = """Name,Price,Stock,Color
Pen,100,50,Red
,5,1,Green
Notebook,$200,500,Blue
Eraser,cheap,3,
"""


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text(CSV, encoding="utf-8")
    return str(path)


class TestGenerateKey:

    def test_key_length(self):
        assert len(generate_api_key()) == 32
        assert len(generate_api_key(16)) == 16

    def test_keys_are_appended(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=DEBUG\n")

        add_key_to_env("first", env_file=str(env_file))
        keys = add_key_to_env("second", env_file=str(env_file))

        assert keys == ["first", "second"]
        values = dotenv_values(env_file)
        assert values["API_KEYS"] == "first,second"
        assert values["LOG_LEVEL"] == "DEBUG"

    def test_creates_missing_env_file(self, tmp_path):
        env_file = tmp_path / ".env"

        add_key_to_env("only", env_file=str(env_file))

        assert dotenv_values(env_file)["API_KEYS"] == "only"


class TestImportFromCsv:

    def test_parse_row(self):
        row = parse_row({"Name": " Pen ", "Price": "€1,100", "Stock": "5", "Color": ""})

        assert row == {"name": "Pen", "price": "1100", "stock": "5", "color": None}

    def test_invalid_rows_are_skipped(self, csv_file):
        rows = list(read_products(csv_file))

        assert [line for line, _ in rows] == [2, 4]
        assert [p.name for _, p in rows] == ["Pen", "Notebook"]
        assert rows[1][1].price == 200.0

    @pytest.mark.asyncio
    async def test_insert_direct(self, csv_file, tmp_path):
        db_file = str(tmp_path / "import.db")

        count = await insert_direct(csv_file, db_file)

        assert count == 2
        products = await SqliteProductRepository(db_file).get_all()
        assert [p.name for p in products] == ["Pen", "Notebook"]

    def test_post_to_api(self, csv_file):
        session = MagicMock()
        session.post.return_value = MagicMock(status_code=303)

        count = post_to_api(csv_file, "http://api.test/", "key", session=session)

        assert count == 2
        url = session.post.call_args.args[0]
        assert url == "http://api.test/products/create"
        assert session.post.call_args.kwargs["headers"] == {"api-key": "key"}
        assert session.post.call_args.kwargs["json"]["name"] == "Notebook"
