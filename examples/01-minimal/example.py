import lazypatch


def build_request_body():
    file = lazypatch.ChangeTrackingNode(logger=lazypatch.NodeLogger(ref={'type': 'file', 'id': '42'}))
    folder = lazypatch.ChangeTrackingNode()

    file.add_change('name', 'Report.pdf')
    file.add_nested_change('parent', folder)
    folder.add_change('id', '123')  # after assigning the folder -- still included.

    return file.get_pending_changes()


if __name__ == '__main__':
    lazypatch.configure(debug=True)
    print(build_request_body())
