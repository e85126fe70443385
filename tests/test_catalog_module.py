from promptshop.app.common.errors import GatewayError


# CAT-001: home page is the products grid
def test_index_renders_products_page(client, gateway, cache_dir):
    gateway.text = "<div class='grid'></div>"

    response = client.get("/")

    assert response.status_code == 200
    assert response.content_type.startswith("text/html")
    assert response.data == b"<div class='grid'></div>"
    assert (cache_dir / "products.html").read_text(encoding="utf-8") == "<div class='grid'></div>"
    assert "grid of cards with two columns" in gateway.prompts("text")[-1]


# CAT-002: the page-render prompt embeds state and the cached template
def test_render_prompt_uses_cached_template(client, gateway, cache_dir):
    cache_dir.mkdir(parents=True, exist_ok=True)
    (cache_dir / "products.html").write_text("<ul>{{#products}}<li>{{name}}</li>{{/products}}</ul>", encoding="utf-8")

    client.get("/")

    prompts = gateway.prompts("text")
    assert len(prompts) == 1
    assert "<ul>{{#products}}<li>{{name}}</li>{{/products}}</ul>" in prompts[0]
    assert '{"products":[],"cart":[]}' in prompts[0]


# CAT-003: product detail passes the route id to the model
def test_product_detail(client, gateway):
    response = client.get("/products/3f1c2a8e")

    assert response.status_code == 200
    prompts = gateway.prompts("text")
    assert all('"product_id": "3f1c2a8e"' in p for p in prompts)
    assert "the id 3f1c2a8e in its full glory" in prompts[-1]


# CAT-004: query string parameters reach the model
def test_query_params_are_forwarded(client, gateway):
    client.get("/?sort=price")
    assert '"sort": "price"' in gateway.prompts("text")[-1]


# CAT-005: transport failures surface as a gateway error
def test_gateway_failure(client, gateway, cache_dir):
    gateway.text = GatewayError("Completion request failed: connection refused")

    response = client.get("/")

    assert response.status_code == 502
    assert response.json["error"]["code"] == "gateway_error"
    assert not (cache_dir / "products.html").exists()


# CAT-006: anything else is a plain 500
def test_unexpected_error(client, gateway):
    gateway.text = RuntimeError("boom")

    response = client.get("/")

    assert response.status_code == 500
    assert response.json["error"]["code"] == "internal_error"
