"""Adaptadores HTTP: construcción de requests, codificación y decodificación.

Por qué aquí:
- Todo el acoplamiento con httpx vive en este paquete; el núcleo no hace I/O.
"""
