"""Customers seated at tables, their status, and the clients for menus and orders."""