class QueryStringError(TypeError):
    def __init__(self, message, key=None):
        super(QueryStringError, self).__init__(message)

        self.key = key
