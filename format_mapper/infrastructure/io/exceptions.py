class FormatMapperInfrastructureError(Exception):
    pass


class DataSourceError(FormatMapperInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class CatalogLoadError(FormatMapperInfrastructureError):
    pass
