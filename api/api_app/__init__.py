# Nombre de archivo: __init__.py
# Ubicación de archivo: api/api_app/__init__.py
# Descripción: Dependencias, esquemas y routers de la API
