import pytest


@pytest.fixture
def og_only_html() -> str:
    """A page that exposes nothing but Open Graph title and image."""
    return """
    <html><head>
      <meta property="og:title" content="Widget">
      <meta property="og:image" content="https://cdn.example/w.png">
    </head><body><p>Nothing else here.</p></body></html>
    """


@pytest.fixture
def generic_product_html() -> str:
    return """
    <html><head>
      <title>Fallback title | Shop</title>
      <meta name="description" content="Meta description">
      <meta property="og:description" content="OG description">
      <meta property="og:image" content="/images/kettle.jpg">
    </head><body>
      <h1>Electric Kettle</h1>
      <span class="price">£34.50</span>
    </body></html>
    """
