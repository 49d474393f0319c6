from . import admins, blogs, modifications, positions, proteins
