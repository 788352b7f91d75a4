"""Pytest configuration and fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI tests configure structlog against captured streams; undo that."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_html():
    """Sample product listing page for testing."""
    return """
<!DOCTYPE html>
<html>
<head>
    <title>Sample Store</title>
</head>
<body>
    <div class="product-list">
        <div class="product-card featured">
            <h2 class="product-title">Sample Product</h2>
            <div class="price-container">
                <span class="price">$99.99</span>
            </div>
        </div>
        <div class="product-card">
            <h2 class="product-title">Other Product</h2>
            <div class="price-container">
                <span class="price">$19.99</span>
            </div>
        </div>
    </div>
</body>
</html>
"""


@pytest.fixture
def sample_file(tmp_path, sample_html):
    """Sample listing page written to disk."""
    path = tmp_path / "listing.html"
    path.write_text(sample_html, encoding="utf-8")
    return path
