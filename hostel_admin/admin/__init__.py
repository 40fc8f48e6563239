"""
Admin module for the Hostel Admin API

Registration, profile update, token lookup, hostel lookup and deletion of
hostel admins. Each route delegates to one function in
``management_service``.
"""
