import json

import pytest

from shopify_admin.core.errors import PartialListError
from shopify_admin.schemas import Metafield, MetafieldType
from shopify_admin.services.metafields import MetafieldService


@pytest.mark.asyncio
async def test_product_metafields_are_scoped_to_the_owner(client):
    service = client.products.metafields(1)

    assert isinstance(service, MetafieldService)
    assert service.resource == "products"
    assert service.resource_id == 1
    assert service.base_path == "products/1/metafields"


@pytest.mark.asyncio
async def test_product_metafields_list(client, mock_shop, load_json):
    mock_shop.add("GET", "products/1/metafields.json", json_body=load_json("metafields.json"))

    metafields = await client.products.metafields(1).list()

    assert [metafield.key for metafield in metafields] == ["app_key", "title_fr"]
    assert metafields[0].owner_resource == "product"


@pytest.mark.asyncio
async def test_product_metafields_list_all(client, mock_shop):
    mock_shop.add(
        "GET", "products/1/metafields.json",
        body='{"metafields": [{"id":1}]}',
        headers={"Link": '<http://valid.url?page_info=pg2>; rel="next"'},
        query={},
    )
    mock_shop.add(
        "GET", "products/1/metafields.json",
        body='{"metafields": [{"id":2}]}',
        headers={"Link": "invalid link"},
        query={"page_info": "pg2"},
    )

    with pytest.raises(PartialListError) as exc_info:
        await client.products.metafields(1).list_all()

    assert exc_info.value.items == [Metafield(id=1)]
    assert str(exc_info.value) == "could not extract pagination link header"


@pytest.mark.asyncio
async def test_product_metafields_count(client, mock_shop):
    mock_shop.add("GET", "products/1/metafields/count.json", body='{"count": 3}')

    assert await client.products.metafields(1).count() == 3


@pytest.mark.asyncio
async def test_product_metafields_get(client, mock_shop, load_json):
    mock_shop.add("GET", "products/1/metafields/721389482.json", json_body=load_json("metafield.json"))

    metafield = await client.products.metafields(1).get(721389482)

    assert metafield.id == 721389482
    assert metafield.namespace == "affiliates"


@pytest.mark.asyncio
async def test_product_metafields_update(client, mock_shop, load_json):
    mock_shop.add("PUT", "products/1/metafields/721389482.json", json_body=load_json("metafield.json"))

    metafield = await client.products.metafields(1).update(
        Metafield(id=721389482, value="app_key", type=MetafieldType.SINGLE_LINE_TEXT_FIELD)
    )

    assert metafield.id == 721389482
    assert json.loads(mock_shop.requests[0].content) == {
        "metafield": {"id": 721389482, "value": "app_key", "type": "single_line_text_field"}
    }


@pytest.mark.asyncio
async def test_product_metafields_delete(client, mock_shop):
    mock_shop.add("DELETE", "products/1/metafields/721389482.json", body="{}")

    await client.products.metafields(1).delete(721389482)

    assert mock_shop.requests[0].url.path.endswith("/products/1/metafields/721389482.json")
