""" Urls of the modules define here... """

# All Namespaces...
from ..deals.handler import deal_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces(api):
        """ Function for adding namespaces... """

        api.add_namespace(deal_namespace, path = '/api/deal')
