import namex


class abstractable_export(namex.export):
    def __init__(self, path):
        super().__init__(package="abstractable", path=path)
