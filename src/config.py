"""
Configuration centrale pour le solveur Démineur.

Ce fichier contient tous les paramètres configurables du solveur,
y compris les bornes de la grille et les chemins des logs.
"""

# Taille maximale d'une grille (largeur et hauteur), imposée par le décodeur
MAX_SIZE = 10

# Valeurs des cellules dans le buffer de grille
CELL_VALUES = {
    'safe': 0,         # Case sûre (indice 0)
    'max_clue': 8,     # Indice maximal (nombre de mines voisines)
    'unknown': 9,      # Case cachée / inconnue
    'mine': 10,        # Mine connue ou déduite
}

# Paramètres du solver
SOLVER_CONFIG = {
    'log_solves': False,   # Écrit chaque résolution dans le DebugLogger
}

# Paramètres du générateur de grilles aléatoires
GENERATOR_CONFIG = {
    'value_range': (0, 10),     # Intervalle [min, max) des valeurs tirées
    'samples_per_size': 64,     # Nombre de grilles par dimension (mode --random)
}

# Chemins des fichiers
PATHS = {
    'logs': 'logs',
}
