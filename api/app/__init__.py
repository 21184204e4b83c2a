# Nombre de archivo: __init__.py
# Ubicación de archivo: api/app/__init__.py
# Descripción: Aplicación FastAPI y verificación de base de datos
