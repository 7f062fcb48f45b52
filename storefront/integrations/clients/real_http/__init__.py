"""
Real HTTP integration clients.

These clients talk to the hosted catalogue database over its REST API:
- rest_catalogue.RestCatalogueClient reads categories and products
- rest_orders.RestOrderSink inserts order-intent rows

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to storefront/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in storefront/api/main.py only.
"""
