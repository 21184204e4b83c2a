# Nombre de archivo: __init__.py
# Ubicación de archivo: api/api_app/routes/__init__.py
# Descripción: Routers FastAPI (health, auth, clientes, inventario, pqr)
