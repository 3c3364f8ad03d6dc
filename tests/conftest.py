"""
Root test configuration.

Test organization:
- unit/        Fast, isolated, no I/O
- integration/ Component boundaries, real I/O to temp locations, Flask client

Run specific levels:
    pytest tests/unit -v           # Fast feedback loop
    pytest tests/integration -v    # Before commit
    pytest tests -v                # Everything
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")


def make_category(name, source, questions, description=""):
    """Raw category record; `questions` is a list of (question, answer)."""
    return {
        "name": name,
        "description": description,
        "source": source,
        "faqs": [{"question": q, "answer": a} for q, a in questions],
    }


WALLET_QUESTIONS = [
    (f"How do I use wallet feature {i}?", f"Open the wallet menu and pick feature {i}.")
    for i in range(1, 13)
]


@pytest.fixture
def corpus_data():
    """
    Multi-source corpus.

    "Mining" is split across sources A and B (3 + 4 questions) with
    "Wallets" (12) in between.
    """
    categories = [
        make_category("Intro", "editors", [
            ("What is this FAQ?", "A collection of questions about the network."),
        ]),
        make_category("Mining", "A", [
            ("What is the block reward halving?", "Every 210,000 blocks the subsidy is cut in half."),
            ("How is difficulty adjusted?", "The target is recalculated every block."),
            ("What is a mining pool?", "A group of miners sharing work and payouts."),
        ]),
        make_category("Wallets", "forum", WALLET_QUESTIONS),
        make_category("Mining", "B", [
            ("What hardware is used for mining?", "SHA-256 ASIC machines."),
            ("What happens after the last halving?", "Miners are paid by fees alone."),
            ("Is solo mining profitable?", "Rarely, because of variance."),
            ("What is hashrate?", "The number of hashes computed per second."),
        ]),
        make_category("Transactions", "docs", [
            ("Do fees rise after a halving?", "Not directly; fees follow demand for block space."),
            ("How long does a confirmation take?", "About ten minutes on average."),
        ]),
    ]
    return {
        "title": "Test FAQ",
        "description": "Fixture corpus",
        "total_faqs": 999,  # Deliberately not the sum of the categories
        "categories": categories,
    }
