# Nombre de archivo: __init__.py
# Ubicación de archivo: db/models/__init__.py
# Descripción: Modelos ORM del dominio PQR
