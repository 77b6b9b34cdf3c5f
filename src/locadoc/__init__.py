# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
locadoc - Lease Contract & Income Report Document Engine

Turns brokerage back-office records (leases, properties, clients, annual
income reports) into printable, word-processor compatible documents.

Key Entry Points:
- locadoc.documents.generate_lease_contract_document() - Rental contract
- locadoc.documents.generate_income_report_document() - Annual income statement
- locadoc.delivery.download_as_word_document() / print_document() - Delivery
- locadoc.listing.filter_properties() - Public listing search

Example Usage:
    ```python
    from locadoc.documents import generate_lease_contract_document
    from locadoc.delivery import download_as_word_document
    from locadoc.records import LeaseRecord

    lease = LeaseRecord(
        tenant_name="Maria Souza",
        property_reference="Apartamento Jardins",
        monthly_value=2300,
    )
    artifact = generate_lease_contract_document(lease, properties)
    download_as_word_document(artifact)
    ```
"""

# Add a NullHandler to the root logger to prevent "No handlers could be found" warnings
# when the library is used in applications that don't configure logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "delivery",
    "documents",
    "listing",
    "records",
    "reporting",
    "resolution",
    "utils",
]


_LAZY_MODULES = {
    "core": "locadoc.core",
    "delivery": "locadoc.delivery",
    "documents": "locadoc.documents",
    "listing": "locadoc.listing",
    "records": "locadoc.records",
    "reporting": "locadoc.reporting",
    "resolution": "locadoc.resolution",
    "utils": "locadoc.utils",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'locadoc' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
