"""
Service layer.

``storage`` owns all entity state behind the ``IStorage`` contract;
``admin_service`` derives the read‑only views shown in the admin
panel.  Route handlers never touch the collections directly.
"""
