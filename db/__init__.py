# Nombre de archivo: __init__.py
# Ubicación de archivo: db/__init__.py
# Descripción: Capa de persistencia SQLAlchemy
