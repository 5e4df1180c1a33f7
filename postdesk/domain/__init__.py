"""
Couche Domaine - Regles metier du back office.

Independante du framework web et de la persistance.
"""
