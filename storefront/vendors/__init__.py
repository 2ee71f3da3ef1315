""" Third-party service clients (media host)... """
