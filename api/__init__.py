# Nombre de archivo: __init__.py
# Ubicación de archivo: api/__init__.py
# Descripción: Paquete de la API HTTP de PQR
