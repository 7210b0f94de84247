class GeometryError(Exception):
    """
    Indicates that the content of otherwise well-formed geometry can't be used
    by an operation, for example a self-intersecting loop passed where a simple
    polygon is required.
    
    Callers usually skip the related map feature.
    """
    def __init__(self, message="", vertices=None):
        if vertices is None:
            msg = message
        else:
            msg = "{}: {}".format(message, list(vertices))
        super().__init__(msg)
        self.vertices = vertices
