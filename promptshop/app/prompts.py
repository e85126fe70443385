from __future__ import annotations

import json
import re
from typing import Any, Dict, Mapping

STYLE_RULES = """All tables should be bordered and have striped, hoverable rows.
All icons should be FontAwesome icons.
When generating HTML forms, you use the information in the JSON schema."""

CART_SIDEBAR = """Also display the cart at the top of the right sidebar.
The cart should display all line item product names and the product counts, in one line for each item.
The cart should also display the total cost of all product prices times the product counts.
Use dollars as the currency.
Also in the cart display a button to show the cart. The button URL is '/cart'.
Draw a border around the cart."""

# Layout page; never generated or cached as a fragment.
LAYOUT_PAGE = "page"

PAGES: Dict[str, str] = {
    "products": f"""Display all products in grid of cards with two columns.
For each product display the name and the price.
A click on the product should open the URL '/products/:id' where :id is the id of the product.
{CART_SIDEBAR}""",
    "product": f"""Display the single product with the id {{id}} in its full glory.
Display all properties of the product.
Display a button for adding the product to the cart. This buttons URL is '/cart/add/:id',
where :id is the product id.
Also display a button for going back to the product list. This buttons URL is '/'
{CART_SIDEBAR}""",
    "cart": """Display the cart.
For each line item display a row containing the product name, the product single price the product count,
the total cost and a button to remove the line item from the cart.
The remove button URL is '/cart/remove/:id', where :id is the product id.
Below the line items, display the total cost of all products.
Use dollars as the currency.
Display a button for checking out the cart. The URL of the button is '/cart/checkout'.
Also display a button for going back to the product list. This buttons URL is '/'""",
    "admin_products": """Display all products in a table one row for each product.
Display the id, name and price for each product.
Each product has a delete link with an icon.
The URL for the delete link is '/admin/products/:id/delete'. Use the id of the respective product for ':id'.
Each product has an edit link with an icon.
The URL for the edit link is '/admin/products/:id/edit'. Use the ID of the respective product for ':id'.
Display a button for creating a new product. The URL of the button is '/admin/products/new'.""",
    "admin_products_new": """Display a form for entering a new product.
Include all product attributes except for the ID.
The action URL of the form is '/admin/products'.
Also add a back button to the form, that links to the URL '/admin/products'.""",
    "admin_products_edit": """Display a form for editing the product with id {id}.
Show all product attributes except for the ID.
The current product data is in the parameters.
The target URL of the form is '/admin/products/:id'. Use the ID of the respective product for ':id'.
The HTTP method of the form is POST.
Add a hidden field to the form with the name '_method' and the value 'PUT'.
Also add a back button to the form, that links to the URL '/admin/products'.""",
}


def page_question(name: str, params: Mapping[str, Any]) -> str:
    """Page-specific instructions with the route's product id filled in."""
    return PAGES[name].format(id=params.get("product_id", ""))


def add_to_cart(product_id: str) -> str:
    return f"""Add the product with the id {product_id} to the cart.
If the product wasn't already in the cart, set it's product count to one.
If the product was already in the cart, increase it's product count by one."""


def remove_from_cart(product_id: str) -> str:
    return f"""Remove the product with the id {product_id} from the cart.
If the product isn't in the cart, do nothing.
If the product is in the cart, completely remove it from the cart."""


def create_product(params: Mapping[str, Any]) -> str:
    return f"Create a new product with these properties: '{format_params(params)}'"


def update_product(product_id: str, params: Mapping[str, Any]) -> str:
    return f"Update the product with the id {product_id} using these properties: {format_params(params)}"


def delete_product(product_id: str) -> str:
    return f"Delete the product with the id {product_id}"


def format_params(params: Mapping[str, Any]) -> str:
    return json.dumps(dict(params), sort_keys=True, ensure_ascii=False)


def build_command_prompt(state_json: str, schema: str, instruction: str) -> str:
    return f"""You are an ecommerce shopping system.
Read your initial state from this JSON data file:
{state_json}
Use this JSON schema for these data:
{schema}
I will give you an instruction and you give me the new contents of the JSON file without any further descriptions.
Instruction: "{instruction}"
"""


def build_template_prompt(schema: str, params: Mapping[str, Any], layout: str, question: str, shop_name: str = "MyShop") -> str:
    return f"""You are the generator for Mustache web page templates of an ecommerce shopping system.
Use this JSON schema for the data that should be displayed with these templates:
{schema}
You are given these additional parameters:
{format_params(params)}
When generating Mustache HTML templates you use a bootstrap design.
You add left an right margin around the page body.
You use this HTML page layout template and embed the page HTML into it:
{layout}
You put a page navigation header at the top of the page. The page title is "{shop_name}".
{STYLE_RULES}
Create an Mustache HTML template output following the following specifications and only output the content of
the generated HTML template file without any further explanations:
{question}
"""


def build_page_prompt(state_json: str, schema: str, params: Mapping[str, Any], template: str, question: str) -> str:
    return f"""You are the generator for web pages of an ecommerce shopping system.
Read your initial state from this JSON data file:
{state_json}
Use this JSON schema for these data:
{schema}
You are given these additional parameters:
{format_params(params)}
You use the JSON data to fill these HTML Mustache template to render the HTML page,
replacing all Mustache elements with the JSON data:
{template}
Calculate all Mustache formulas yourself.
When generating HTML content you use a bootstrap design.
{STYLE_RULES}
Reuse all of the HTML from the HTML template.
Create an HTML output following the following specifications and only output the content of
the generated HTML file without any further explanations:
{question}
"""


_FENCE_OPEN = re.compile(r"^```.+", re.MULTILINE)
_FENCE_CLOSE = re.compile(r"```$", re.MULTILINE)


def strip_code_fences(text: str) -> str:
    """Drop markdown code fences the model likes to wrap HTML in."""
    return _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", text))


def preview(prompt: str, width: int = 137) -> str:
    return prompt.replace("\n", " ")[:width] + "..."
