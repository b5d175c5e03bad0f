"""Property names understood by the JDBC database connector.

The connector reads its connection and input/output settings from the job
configuration under these keys. The strings must match the connector's
exactly; they are re-exported here, not chosen here.
"""


class DBConfiguration:
    """Namespace for the connector's configuration property names."""

    DRIVER_CLASS_PROPERTY = "mapreduce.jdbc.driver.class"
    URL_PROPERTY = "mapreduce.jdbc.url"
    USERNAME_PROPERTY = "mapreduce.jdbc.username"
    PASSWORD_PROPERTY = "mapreduce.jdbc.password"
    FETCH_SIZE = "mapreduce.jdbc.fetchsize"
    CONNECTION_PARAMS_PROPERTY = "mapreduce.jdbc.params"

    INPUT_TABLE_NAME_PROPERTY = "mapreduce.jdbc.input.table.name"
    INPUT_FIELD_NAMES_PROPERTY = "mapreduce.jdbc.input.field.names"
    INPUT_CONDITIONS_PROPERTY = "mapreduce.jdbc.input.conditions"
    INPUT_ORDER_BY_PROPERTY = "mapreduce.jdbc.input.orderby"
    INPUT_QUERY = "mapreduce.jdbc.input.query"
    INPUT_COUNT_QUERY = "mapreduce.jdbc.input.count.query"
    INPUT_BOUNDING_QUERY = "mapred.jdbc.input.bounding.query"
    INPUT_CLASS_PROPERTY = "mapreduce.jdbc.input.class"

    OUTPUT_TABLE_NAME_PROPERTY = "mapreduce.jdbc.output.table.name"
    OUTPUT_FIELD_NAMES_PROPERTY = "mapreduce.jdbc.output.field.names"
    OUTPUT_FIELD_COUNT_PROPERTY = "mapreduce.jdbc.output.field.count"

    def __init__(self):
        raise TypeError("DBConfiguration is a namespace of constants")
