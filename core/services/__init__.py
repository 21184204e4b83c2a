# Nombre de archivo: __init__.py
# Ubicación de archivo: core/services/__init__.py
# Descripción: Servicios de negocio (clientes, inventario, plazos, historial, PQR, auth)
