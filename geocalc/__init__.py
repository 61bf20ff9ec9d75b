"""geocalc — area and perimeter calculator for basic figures.

Asks for a figure (circulo, cuadrado, triangulo, rectangulo, pentagono) and an
operation (area, perimetro), reads the dimensions that formula needs, and
prints "Resultado: <value>". PI is fixed at 3.1416.

Usage:
    python -m geocalc
"""
